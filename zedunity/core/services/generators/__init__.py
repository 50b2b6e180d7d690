"""
Generators — produce project, solution and workspace files.

Each generator returns ``GeneratedFile`` instances; nothing here touches
the disk. ``project_generation.write_generated`` materialises them.
"""

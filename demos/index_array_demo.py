"""
Index Array Demo

This script drives a gridmesh Session the way a host patch would: set a
dimension and draw mode, apply a few procedural filters, and write the
resulting index array to disk.

Usage:
    python index_array_demo.py

The script will:
1. Build a 20x20 quad surface
2. Apply the fill, random, reverse, ring and spiral filters in turn
3. Switch to triangles and apply a ring filter in face order
4. Save the final index array as text
"""

import logging
from pathlib import Path

from gridmesh import Session, SurfaceConfig
from gridmesh.io import save_index_array
from gridmesh.logging_config import setup_logging


def report(session, label):
    matrix, face_count = session.emit()
    visible = session.get_info()["visible_faces"]
    print(f"  {label:<10} faces={face_count} visible={visible} cells={matrix.size}")


def main():
    setup_logging(logging.WARNING)

    session = Session(SurfaceConfig(dim=(20, 20), draw_mode="quads", seed=7))

    print("Quad surface:")
    report(session.fill(), "fill")
    report(session.random(density=2.0), "random")
    report(session.reverse(), "reverse")
    report(session.ring(4), "ring")
    report(session.spiral(), "spiral")

    print("\nTriangle surface:")
    session.set_draw_mode("triangles")
    report(session.ring(3), "ring")

    output_path = Path(__file__).parent / "index_array.txt"
    save_index_array(session.surface.index_array(), output_path)
    print(f"\nIndex array saved to: {output_path}")

    return session


if __name__ == "__main__":
    main()

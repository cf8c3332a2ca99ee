"""draftcore - Geometry core for a 2D CAD drawing engine.

draftcore provides the primitive model (lines, circles, rectangles, arcs,
ellipses, polylines and splines), the intersection library, trim and extend
editing operations, and a priority-ranked snapping engine. Everything operates
on immutable values so documents can be shared freely and edited by
copy-on-write.

Example:
    $ draftcore snap drawing.json 12.5 4.0

This prints the snap target a pointer at (12.5, 4.0) would lock onto.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]

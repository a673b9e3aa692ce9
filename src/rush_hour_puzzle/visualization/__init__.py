"""pygame front-end: board projection and the mouse-driven play loop."""

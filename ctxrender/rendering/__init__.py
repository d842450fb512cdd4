"""Template reading, rendering and output."""

"""Canvas, image encoding and the pixel loop."""

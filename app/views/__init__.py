"""Page renderers for GIF Match."""

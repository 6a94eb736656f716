class RenderError(Exception):
	"""Error while rendering compiled output with the reference runtime."""

"""FastAPI adapter exposing the points and pricing engine over HTTP."""

"""Packaged data files for journeygraph."""

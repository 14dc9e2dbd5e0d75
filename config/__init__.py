"""
Configuration package for the game server.

Settings are read from the environment (and a local .env file) once at import.
"""

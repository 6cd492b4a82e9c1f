"""Domain layer — field rules, URL checks, and error types.

This layer depends only on stdlib.
It must never import from services or config.
"""

"""Configuration layer — emulator resolution, settings, and logging."""

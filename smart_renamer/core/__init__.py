"""Convention codec, detection and shared enums."""

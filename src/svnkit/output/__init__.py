"""Result renderers."""

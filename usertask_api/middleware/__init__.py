"""Request authentication and cross-origin configuration."""

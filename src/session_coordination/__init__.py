"""Client-side real-time session coordination: presence, connection quality, push-to-talk."""

__version__ = "0.1.0"

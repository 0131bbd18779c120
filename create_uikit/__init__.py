"""create-uikit: scaffold UIKit React applications and Chrome extensions."""

__version__ = "2.0.0"

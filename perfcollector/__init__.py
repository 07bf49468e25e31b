"""Collect CPU and memory usage of an Android app over adb."""

__version__ = "0.1.0"

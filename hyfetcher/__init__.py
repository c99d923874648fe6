"""Offline downloader that saves listed web pages with their images and videos and builds an index."""

__version__ = "0.1.0"
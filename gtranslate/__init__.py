"""Translate text from the command line with the Google Cloud Translation API."""

"""Nexus Notes: subjects, chapters and notes with AI study helpers."""

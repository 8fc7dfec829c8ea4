"""
Core package for the content profile generator.

This package turns a raw video transcript into a structured content
profile (title, tags, summary, HTML description and so on).  It composes
the prompt, streams the model response, interprets the accumulated JSON and
renders the result as a downloadable RTF document.
"""

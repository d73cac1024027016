"""DWG version classifier.

Reads the six byte version code at the start of each DWG file in a folder,
maps it to a release label and counts files per version.
"""

__version__ = "0.1.0"

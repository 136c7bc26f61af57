"""
jsoncompare version constants.
"""

# Library version (matches pyproject.toml)
JSONCOMPARE_VERSION = "0.1.0"

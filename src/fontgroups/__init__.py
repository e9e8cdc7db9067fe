"""fontgroups - Upload TTF fonts and organize them into font groups.

fontgroups stores uploaded TTF files and lets you gather them into named
groups of two or more fonts, for example to pick the typefaces of a design
project. All records live in a single JSON file next to an uploads directory.

Example:
    $ fontgroups fonts upload Arial.ttf Georgia.ttf
    $ fontgroups groups create "Body Text" <arial-id> <georgia-id>
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]

"""
The VIEW layer: Qt widgets for the role map and the role detail pages.
"""

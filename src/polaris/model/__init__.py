"""
The MODEL layer contains pure data structures.
It has NO knowledge of the GUI (Qt) or the plotting (pyqtgraph).
It deals with roles, detail pages, the data sources and the session state.
"""

"""
The CONTROLLER layer runs data source calls in the background and feeds the
results through the layout engine into the session state.
"""

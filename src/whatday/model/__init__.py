"""
The MODEL layer contains pure data structures and calendar logic.
It has NO knowledge of the GUI (Qt).
It deals with dates, the current selection and the static app catalog.
"""

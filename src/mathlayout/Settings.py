# This is a module for storing settings passed into the layout. It correctly
# handles default settings.

# The main Settings object
#
# The current options stored are:
#  - displayMode: Whether the math is laid out in display mode (in which case
#                 the root is in displaystyle) or not (in which case it is
#                 inline, in textstyle)
#  - throwOnError: Whether layout errors are raised, or rendered as an
#                  mjx-merror node in the output
#  - errorColor: The color of the error message when throwOnError is False
#  - scriptspace: The extra space after a script, overriding the value from
#                 the font parameters when given
class Settings:
    def __init__(self, displayMode=False, throwOnError=True, errorColor="#cc0000", scriptspace=None):
        self.displayMode = displayMode
        self.throwOnError = throwOnError
        self.errorColor = errorColor
        self.scriptspace = scriptspace

from url_redirector.tui.renderers import RedirectorConsoleUI

__all__ = ["RedirectorConsoleUI"]

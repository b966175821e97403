# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#   pyactionmenu: in-editor action menu (popup with shortcuts + one callback).
#
# Notes:
#   Import from the subpackages: pyactionmenu.menu (core), pyactionmenu.ui
#   (Tk host), pyactionmenu.app (editor window + callbacks).
# ---------------------------------------------------------------------------

__version__ = "0.1.0"

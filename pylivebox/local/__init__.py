from pylivebox.local.pylivebox_local import PyLiveboxLocal

__all__ = ["PyLiveboxLocal"]

"""reflowkit

Greedy text reflow plus a small kit of text, XML, database and reference-data
helpers. The wrapping engine is exposed at the package root.
"""

__all__ = ["__version__", "wrap", "wrap_with", "WrapConfig", "WrapMethod"]
__version__ = "0.1.0"

from reflowkit.domain.reflow import wrap, wrap_with  # noqa: E402
from reflowkit.domain.value_objects import WrapConfig, WrapMethod  # noqa: E402

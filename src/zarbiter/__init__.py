"""
zarbiter - z-index arbitration for stylesheets

zarbiter hands out consistent stacking-order values for named semantic
layers (modal, tooltip, ...) and flags suspiciously large literal z-index
values in stylesheet text.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]

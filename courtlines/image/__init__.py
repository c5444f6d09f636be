from .loader import load, load_raw, load_image, binarize

__all__ = ["load", "load_raw", "load_image", "binarize"]

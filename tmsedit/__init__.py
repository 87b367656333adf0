"""tmsedit — narzędzie CLI do edycji plików TMS wagi sklepowej."""

__version__ = "0.1.0"

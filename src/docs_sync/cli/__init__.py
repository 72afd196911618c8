"""
CLI Subpackage.

Modules:
    - ``__main__``: The argparse definition and dispatcher.
    - ``report``: Rich rendering of rename plans for dry runs.
"""

# anylaunch Package
"""
"Launch anything" query engine.

Turns one line of typed text into a ranked list of actions:
  - Commands: run the text as a command line
  - Applications: installed desktop applications
  - Files: open or complete typed paths
  - URLs: open typed links
  - Calculator: inline arithmetic
  - History: replay earlier commands
  - Web search: fallback for everything else
"""

__version__ = "0.1.0-dev"

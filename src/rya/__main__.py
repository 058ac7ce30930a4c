"""rya 入口点。

支持: python -m rya
"""

from .app import main

if __name__ == "__main__":
    main()

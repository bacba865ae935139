"""Allow running proctop with ``python -m proctop``."""

from proctop.app import main

if __name__ == "__main__":
    main()

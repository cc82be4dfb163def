"""Allow ``python -m file_organizer``."""

from .cli import main

if __name__ == '__main__':
    main()

"""Package entry point for ``python -m better_svg``.

WHY: Users can run the tool without installing the console script,
e.g. ``python -m better_svg optimize Icon.tsx --in-place``.

HOW: Delegates to the CLI's main().
"""

from better_svg.cli import main

if __name__ == "__main__":
    main()

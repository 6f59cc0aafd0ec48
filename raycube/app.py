"""Command-line entry point."""

from __future__ import annotations

import sys

from raycube.game import Game
from raycube.scene import SceneError, check_extension, load_scene

_USAGE_ERROR = "ERROR! WRONG ARGUMENTS SINTAXIS..."
_GOODBYE = " [FIN DEL JUEGO] "


def main(argv: list[str] | None = None) -> int:
    """Run the game on the scene file named in ``argv``; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = "--bonus" in args
    if bonus:
        args.remove("--bonus")
    if len(args) != 1:
        print(_USAGE_ERROR)
        return 1
    try:
        path = check_extension(args[0])
        scene = load_scene(path)
        game = Game(scene, bonus=bonus)
        game.run()
    except SceneError as exc:
        print(exc)
        return 1
    print(_GOODBYE)
    return 0


if __name__ == "__main__":
    sys.exit(main())
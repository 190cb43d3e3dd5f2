import argparse
import json
import logging
import sys
from typing import Any, Mapping, Optional, Sequence

from sketchgeom import (
    Scene,
    UnsupportedShapeError,
    calculate_points,
    get_element_shape,
    is_point_in_shape,
    is_point_on_shape,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _load_scene(path: str) -> Scene:
    with open(path, encoding="utf-8") as fin:
        payload: Any = json.load(fin)
    if isinstance(payload, Mapping):
        payload = payload.get("elements", [])
    if not isinstance(payload, list):
        raise SystemExit(f"{path}: expected a list of elements or an object with 'elements'")
    logger.info("Loaded %d element(s) from %s", len(payload), path)
    return Scene.from_dicts(payload)


def _run_route(scene: Scene, arrow_id: Optional[str]) -> int:
    arrows = [el for el in scene.get_non_deleted_elements() if el.type == "arrow"]
    if arrow_id is not None:
        arrows = [el for el in arrows if el.id == arrow_id]
        if not arrows:
            logger.error("No arrow with id %s in scene", arrow_id)
            return 1

    for arrow in arrows:
        points = calculate_points(arrow, scene)
        print(f"{arrow.id}:")
        for x, y in points:
            print(f"  ({x:.6f}, {y:.6f})")
    if not arrows:
        print("(no arrows)")
    return 0


def _run_hit(scene: Scene, x: float, y: float, tolerance: float) -> int:
    elements_map = scene.get_non_deleted_elements_map()
    for element in scene.get_non_deleted_elements():
        try:
            shape = get_element_shape(element, elements_map)
        except UnsupportedShapeError:
            logger.warning("Skipping element %s with unsupported type %s", element.id, element.type)
            continue
        if is_point_on_shape((x, y), shape, tolerance):
            verdict = "border"
        elif is_point_in_shape((x, y), shape):
            verdict = "inside"
        else:
            verdict = "outside"
        print(f"{element.id} [{shape.type}]: {verdict}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Route connectors and hit-test shapes in a scene")
    parser.add_argument("path", help="Path to a JSON scene (list of elements)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    route_parser = subparsers.add_parser("route", help="Print routed points for arrows")
    route_parser.add_argument("--id", dest="arrow_id", help="Only route the arrow with this id")

    hit_parser = subparsers.add_parser("hit", help="Hit-test a point against every shape")
    hit_parser.add_argument("x", type=float)
    hit_parser.add_argument("y", type=float)
    hit_parser.add_argument(
        "--tolerance",
        type=float,
        default=0.0,
        help="Border tolerance in scene units (default: 0)",
    )

    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    scene = _load_scene(args.path)
    logger.info("Running %s command", args.command)

    if args.command == "route":
        status = _run_route(scene, args.arrow_id)
    else:
        status = _run_hit(scene, args.x, args.y, args.tolerance)
    if status:
        raise SystemExit(status)


if __name__ == "__main__":
    main(sys.argv[1:])

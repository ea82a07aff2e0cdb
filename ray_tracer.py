import argparse
import math
import sys
import time
from typing import List

from camera import PinholeCamera
from image_export import RenderError, save_image
from render_settings import DEFAULT_MAX_DEPTH, RenderSettings
from renderer import render
from scene_presets import SCENE_PRESETS, build_scene


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer, got {}".format(value))
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Python Ray Tracer')
    parser.add_argument('output_image', type=str, nargs='?', default='image.png', help='Name of the output image file')
    parser.add_argument('--scene', choices=sorted(SCENE_PRESETS), default='default', help='Built-in scene to render')
    parser.add_argument('--width', type=positive_int, default=1024, help='Image width')
    parser.add_argument('--height', type=positive_int, default=768, help='Image height')
    parser.add_argument('--fov', type=float, default=90.0, help='Vertical field of view in degrees')
    parser.add_argument(
        '--max-depth',
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help='Deepest reflection level that still queries the scene',
    )
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    def log_phase(label: str, seconds: float) -> None:
        print(f"[phase] {label}: {seconds:.2f}s")

    try:
        settings = RenderSettings(max_depth=args.max_depth, fov=math.radians(args.fov))
    except ValueError as err:
        parser.error(str(err))

    build_start = time.perf_counter()
    scene = build_scene(args.scene)
    log_phase("build_scene", time.perf_counter() - build_start)

    render_start = time.perf_counter()
    framebuffer = render(scene, args.width, args.height, settings, PinholeCamera(settings.fov))
    log_phase("render", time.perf_counter() - render_start)

    save_start = time.perf_counter()
    try:
        save_image(framebuffer.width, framebuffer.height, framebuffer.to_bytes(), args.output_image)
    except RenderError as err:
        print(f"[error] render failed: {err}", file=sys.stderr)
        return 1
    log_phase("save_image", time.perf_counter() - save_start)

    print(
        "[stats] pixels={pixels}, spheres={spheres}, lights={lights}".format(
            pixels=framebuffer.width * framebuffer.height,
            spheres=len(scene.spheres),
            lights=len(scene.lights),
        )
    )
    return 0


def run() -> None:
    program_start = time.time()
    readable_start = time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(program_start))
    print(f"[timer] Program started at {readable_start}")
    try:
        exit_code = main()
    finally:
        program_end = time.time()
        readable_end = time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(program_end))
        elapsed = program_end - program_start
        print(f"[timer] Program ended at {readable_end} (elapsed {elapsed:.2f}s)")
    sys.exit(exit_code)


if __name__ == '__main__':
    run()

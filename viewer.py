import os
import sys
import warnings
from argparse import ArgumentParser
from pathlib import Path

_VERBOSE_FLAGS = {"--verbose", "-v"}
_cli_verbose = any(arg in _VERBOSE_FLAGS for arg in sys.argv[1:])
_env_log_level = os.environ.get("TF_CPP_MIN_LOG_LEVEL")
_suppress_messages = (not _cli_verbose) and _env_log_level != "0"

if _suppress_messages and _env_log_level is None:
    os.environ["TF_CPP_MIN_LOG_LEVEL"] = "3"

if _suppress_messages:
    warnings.filterwarnings(
        "ignore",
        message=r"Protobuf gencode version .* is exactly one major version older than the runtime version .*",
        category=UserWarning,
        module="google.protobuf",
    )

VERBOSE = _cli_verbose


def log(message, *args, **kwargs):
    if VERBOSE:
        print(message, *args, **kwargs)


import tensorflow as tf

if _suppress_messages:
    tf.get_logger().setLevel("ERROR")
    for handler in tf.get_logger().handlers:
        handler.setLevel("ERROR")

from burningship import ViewerConfig, ViewerSession, colorize, render_frame
from burningship.config import DEFAULT_FPS, WINDOW_HEIGHT, WINDOW_WIDTH
from burningship.display import DisplayError, PygameDisplay
from burningship.output import GifRecorder, write_single_image
from burningship.renderer import MAX_ITERATION
from burningship.zoom import MIN_ZOOM, ZOOM_STEP

DEVICE = '/CPU:0'


def build_parser():
    parser = ArgumentParser(description='Interactive burning ship fractal viewer. Scroll to zoom at the cursor.')

    parser.add_argument('--width', type=int,
                        dest='width', help='window width in pixels',
                        metavar='WIDTH', default=WINDOW_WIDTH)

    parser.add_argument('--height', type=int,
                        dest='height', help='window height in pixels',
                        metavar='HEIGHT', default=WINDOW_HEIGHT)

    parser.add_argument('--max-iterations', type=int,
                        dest='max_iteration', help='iteration budget before a point is considered bound',
                        metavar='MAX_ITERATIONS', default=MAX_ITERATION)

    parser.add_argument('--initial-zoom', type=float,
                        dest='initial_zoom', help='starting magnification, at least 1',
                        metavar='ZOOM', default=MIN_ZOOM)

    parser.add_argument('--x-center', type=float,
                        dest='x_center', help='real part of the starting view origin',
                        metavar='X_CENTER', default=0.0)

    parser.add_argument('--y-center', type=float,
                        dest='y_center', help='imaginary part of the starting view origin',
                        metavar='Y_CENTER', default=0.0)

    parser.add_argument('--zoom-step', type=float,
                        dest='zoom_step', help='fractional zoom change per wheel notch',
                        metavar='ZOOM_STEP', default=ZOOM_STEP)

    parser.add_argument('--colormap', type=str,
                        dest='colormap', help='matplotlib colormap used instead of grayscale (e.g. "magma")',
                        metavar='COLORMAP', default=None)

    parser.add_argument('--fps', type=int,
                        dest='fps', help='maximum event polling rate of the window',
                        metavar='FPS', default=DEFAULT_FPS)

    parser.add_argument('--output', dest='output', type=str,
                        help='Render the starting view once to this file instead of opening a window.')

    parser.add_argument('--format', type=str,
                        dest='format', help='file format for --output. Any extension supported by Pillow. Default: the --output suffix, else "png".',
                        metavar='FORMAT', default=None)

    parser.add_argument('--record', dest='record', type=str,
                        help='Append every frame shown in the window to this GIF.')

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable verbose logging, including render timings and TensorFlow diagnostics.')

    return parser


def config_from_args(opt, parser: ArgumentParser) -> ViewerConfig:
    try:
        return ViewerConfig(
            width=opt.width,
            height=opt.height,
            max_iteration=opt.max_iteration,
            initial_zoom=opt.initial_zoom,
            origin=complex(opt.x_center, opt.y_center),
            zoom_step=opt.zoom_step,
            colormap=opt.colormap,
            fps=opt.fps,
        )
    except ValueError as exc:
        parser.error(str(exc))


def resolve_output(opt, parser: ArgumentParser) -> tuple[Path, str]:
    output_path = Path(opt.output).expanduser()
    image_format = (opt.format or output_path.suffix or "png").lower().lstrip(".")
    if output_path.suffix:
        if output_path.suffix.lower() != f".{image_format}":
            parser.error(f"--output extension {output_path.suffix} does not match --format {image_format}.")
    else:
        output_path = output_path.with_suffix(f".{image_format}")
    if opt.record:
        parser.error("--record is only valid in the interactive viewer, not with --output.")
    return output_path.resolve(), image_format


def render_to_file(config: ViewerConfig, output_path: Path, image_format: str) -> None:
    result = render_frame(config.initial_viewport(), config.max_iteration, device=DEVICE)
    log("render took %.3fs" % result.elapsed)
    pixels = colorize(result.iterations, config.max_iteration, config.colormap)
    write_single_image(pixels, output_path, image_format)
    print(f"Wrote {output_path}")


def run_interactive(config: ViewerConfig, record: str | None) -> int:
    display = PygameDisplay(config.width, config.height, fps=config.fps)
    recorder = None
    try:
        display.open()
        if record:
            recorder = GifRecorder(Path(record).expanduser().resolve())
        session = ViewerSession(config, display, recorder, device=DEVICE, log=log)
        session.run()
    except DisplayError as exc:
        print(f"Error while initializing video: {exc}\nExiting.")
        return 1
    except (MemoryError, tf.errors.ResourceExhaustedError) as exc:
        print(f"Error while allocating memory for fractal generator: {exc!r}\nExiting.")
        return 1
    finally:
        if recorder is not None:
            recorder.close()
            log("recorded %d frames to %s" % (recorder.frames, recorder.path))
        display.close()
    return 0


def main(argv=None):
    parser = build_parser()
    opt = parser.parse_args(argv)

    global VERBOSE
    VERBOSE = bool(opt.verbose)
    log("TensorFlow version: %s" % tf.__version__)

    config = config_from_args(opt, parser)

    if opt.output:
        output_path, image_format = resolve_output(opt, parser)
        try:
            render_to_file(config, output_path, image_format)
        except (MemoryError, tf.errors.ResourceExhaustedError) as exc:
            print(f"Error while allocating memory for fractal generator: {exc!r}\nExiting.")
            return 1
        return 0

    return run_interactive(config, opt.record)


if __name__ == '__main__':
    sys.exit(main())

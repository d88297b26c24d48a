import argparse
import os
import sys

from drive_icon_randomizer.config import default_working_dir
from drive_icon_randomizer.drives import (is_admin, is_windows, list_fixed_drives,
                                          notify_shell)
from drive_icon_randomizer.errors import UsageError
from drive_icon_randomizer.images import find_images
from drive_icon_randomizer.randomizer import apply_icons, clear_icons
from drive_icon_randomizer.registry import DriveIconRegistrar, WindowsRegistry
from drive_icon_randomizer.store import IconStore

PROG = "drive-icon-randomizer"

USAGE = f"""Usage:
{PROG} <path to image directory>
\tSets the drive icons for all fixed drives to random images in the specified directory
{PROG} --clear
\tClears all drive icons
"""


def build_parser():
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=USAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Writing drive icons needs Administrator rights.")
    parser.add_argument("image_dir", nargs="?",
                        help="folder with .jpg/.jpeg/.png/.gif/.bmp pictures")
    parser.add_argument("--clear", action="store_true",
                        help="remove the icons of all fixed drives")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="print which picture goes to which drive")
    parser.add_argument("--working-dir", metavar="DIR",
                        help="where generated .ico files are kept")
    return parser


def _check_args(args):
    if args.clear and args.image_dir:
        raise UsageError("Use either an image directory or --clear, not both")
    if not args.clear and not os.path.isdir(args.image_dir):
        raise UsageError(f"Directory does not exist: {args.image_dir}")


def main(argv=None):
    args = build_parser().parse_args(argv)
    if not args.clear and not args.image_dir:
        print(USAGE, end="")
        return 2

    if not is_windows():
        print("Windows only.")
        return 1

    try:
        _check_args(args)
    except UsageError as e:
        print(e)
        return 1

    store = IconStore(args.working_dir or default_working_dir())
    try:
        store.ensure_working_directory()
    except OSError as e:
        print(f"Cannot create working directory {store.working_dir}: {e}")
        return 1

    if not is_admin():
        print("Warning: not running as Administrator, "
              "registry changes will probably fail.")

    drives = list_fixed_drives()
    registrar = DriveIconRegistrar(WindowsRegistry())

    if args.clear:
        clear_icons(drives, store, registrar)
    else:
        images = find_images(args.image_dir)
        apply_icons(drives, images, store, registrar, verbose=args.verbose)

    notify_shell()
    return 0


if __name__ == "__main__":
    sys.exit(main())

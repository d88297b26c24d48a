"""
Apply / clear pipelines.

Each drive is handled on its own: a failure is reported through `status_cb`
together with the drive name and the next drive is processed anyway.
"""

import os
import random
from collections import namedtuple

from drive_icon_randomizer.drives import drive_letter
from drive_icon_randomizer.errors import DriveIconError
from drive_icon_randomizer.icon import image_to_icon

DriveResult = namedtuple("DriveResult", "drive ok image icon_path error",
                         defaults=(None, None, None))


def pick_images(images, count, rng=None):
    """Up to `count` distinct images in random order."""
    rng = rng or random.Random()
    return rng.sample(list(images), min(count, len(images)))


def apply_icons(drives, images, store, registrar, rng=None,
                status_cb=print, verbose=False):
    """
    Give each drive one random image as its icon.
    With fewer images than drives the remaining drives are left alone
    and get no entry in the returned results.
    """
    results = []
    for drive, image in zip(drives, pick_images(images, len(drives), rng)):
        name = os.path.basename(image)
        if verbose:
            status_cb(f"Setting icon for drive {drive} to {name}")
        try:
            data = image_to_icon(image)
            ico_path = store.save(data, name)
            registrar.set(drive_letter(drive), ico_path)
        except (DriveIconError, OSError, ValueError) as e:
            status_cb(f"Error setting icon for drive {drive}: {e}")
            results.append(DriveResult(drive, False, image, error=e))
            continue
        results.append(DriveResult(drive, True, image, ico_path))
    return results


def clear_icons(drives, store, registrar, status_cb=print):
    """Remove the icon binding of every drive, then delete all generated icons."""
    results = []
    for drive in drives:
        try:
            registrar.clear(drive_letter(drive))
        except (DriveIconError, ValueError) as e:
            status_cb(f"Error clearing icon for drive {drive}: {e}")
            results.append(DriveResult(drive, False, error=e))
            continue
        results.append(DriveResult(drive, True))

    for path, e in store.clear_all():
        status_cb(f"Error deleting {path}: {e}")
    return results

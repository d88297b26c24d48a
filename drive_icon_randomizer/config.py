import os

APP_FOLDER = "DriveIconRandomizer"
ENV_WORKING_DIR = "DRIVE_ICON_RANDOMIZER_DIR"


def default_working_dir(environ=None):
    """
    Folder for generated .ico files.
    %APPDATA%\\DriveIconRandomizer unless DRIVE_ICON_RANDOMIZER_DIR says otherwise.
    """
    env = os.environ if environ is None else environ
    override = env.get(ENV_WORKING_DIR, "").strip()
    if override:
        return os.path.abspath(os.path.expanduser(override))
    root = env.get("APPDATA") or os.path.join(
        os.path.expanduser("~"), "AppData", "Roaming")
    return os.path.join(root, APP_FOLDER)

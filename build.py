import subprocess
import sys
import os


def build():
    # Define PyInstaller arguments
    args = [
        "pyinstaller",
        "main.py",
        "--name",
        "InventaryAdmin",
        "--clean",
        "--onefile",
        "--collect-all",
        "flet_desktop",  # Bundle Flet desktop runtime
        "--collect-data",
        "flet",  # Bundle Flet data files (icons.json etc.)
        "--collect-submodules",
        "inventary",
        "--hidden-import",
        "PIL.Image",
    ]

    if os.path.exists("app.ico"):
        args += ["--icon", "app.ico", "--add-data", "app.ico;."]

    # CI (GitHub Actions etc.) keeps the console for build logs
    if not os.environ.get("CI"):
        args.append("--noconsole")

    print(f"Running: {' '.join(args)}")
    result = subprocess.run(args)

    if result.returncode == 0:
        print("\nBuild successful! Executable is in the 'dist' folder.")
    else:
        print("\nBuild failed.")
        sys.exit(result.returncode)


if __name__ == "__main__":
    build()

from setuptools import setup

setup(
    name="xfetch",
    version="1.0",
    py_modules=[
        "xfetch",
        "collector",
        "facts",
        "text_utils",
        "env_probe",
        "file_reader",
        "command_reader",
        "runtime_probe",
        "display_probe",
    ],
    python_requires=">=3.8",
    install_requires=[
        "rich",
        "python-xlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "xfetch=xfetch:main",
        ],
    },
)

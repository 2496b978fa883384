from setuptools import find_packages, setup

classifiers = [
    "Environment :: Console",
    "License :: OSI Approved :: MIT License",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.8",
    "Programming Language :: Python :: 3.9",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3 :: Only",
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

with open("README.md", "r") as fp:
    long_description = fp.read()

setup(
    name="term-gif",
    version="0.1.0",
    description="Play animated images in the terminal using indexed colors",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=classifiers,
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "pillow>=9.1",
        "requests>=2.23,<3.0",
        "typing_extensions>=4.0",
        "urwid>=2.1",
    ],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["term-gif=term_gif.__main__:main"]},
    keywords=[
        "gif",
        "animation",
        "terminal",
        "viewer",
        "PIL",
        "Pillow",
        "urwid",
        "console",
        "xterm",
        "256color",
        "cli",
        "ANSI",
    ],
)

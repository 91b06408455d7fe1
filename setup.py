from setuptools import setup, find_packages

setup(
    name="statestack",
    version="0.1.0",
    description="Stack-based state machine for menus, overlays, dialogues and cutscenes",
    author="mseibert",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "Pillow>=10.0.0",
        "PyYAML>=6.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "statestack=statestack.main:main",
        ],
    },
)

# setup.py
from setuptools import setup, find_packages

setup(
    name="adt_minimap",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "Pillow>=9.1.0",
        "numpy>=1.21",
        "tqdm>=4.60",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
    description="Builds annotated minimap overviews of World of Warcraft maps from WDT/ADT data",
    keywords="wow, adt, wdt, minimap",
    entry_points={
        'console_scripts': [
            'adt-minimap=adt_minimap.main:main',
        ],
    }
)

# setup.py
from setuptools import setup, find_packages

setup(
    name="pud_analyzer",
    version="0.1.0",
    packages=find_packages(include=['pud_analyzer', 'pud_analyzer.*']),
    install_requires=[
        "Pillow>=9.0.0",
        "numpy>=1.21.0",
        "construct>=2.10.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
    description="A tool for decoding and previewing Warcraft II PUD map files",
    keywords="warcraft2, pud, map, analysis",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    entry_points={
        'console_scripts': [
            'render-pud=pud_analyzer.main:main',
        ],
    }
)

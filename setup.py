# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="jscompiler",
    version="1.0.0",
    description="Minificador de JavaScript con caché de ficheros direccionada por contenido",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["jscompiler", "jscompiler.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'jscompiler=jscompiler.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)

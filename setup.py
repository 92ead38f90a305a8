from setuptools import setup, find_packages

setup(
    name="rainbow_loop",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["rainbow_loop_cli"],
    install_requires=[
        "numpy",
        "opencv-python",
        "moviepy>=2.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'rainbow-loop=rainbow_loop_cli:main',
        ],
    },
    python_requires='>=3.8',
    description="Looping rainbow gradient animation for UI elements",
    author="Rainbow Loop",
)

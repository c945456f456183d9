from setuptools import setup, find_packages

setup(
    name='flo_extrapolate',
    version='1.0.0',
    description='Bilinear extrapolation of FLO/FLOW optical flow files to a new resolution',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    install_requires=[
        'numpy>=1.21',
        'matplotlib>=3.4',
        'Pillow>=8.0',
    ],
    extras_require={
        'dev': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'flo-extrapolate=flo_extrapolate.cli:main',
        ],
    },
    test_suite='tests',
    tests_require=['pytest>=7.0'],
)

from setuptools import setup

setup(
    name='tessera',
    version='0.1.0',
    description='Persistent lists and a composable text-picture algebra',
    author='Tessera contributors',
    package_dir={'': 'src'},
    packages=['tessera', 'tessera.cli', 'tessera.renderer', 'tessera.runtime'],
    python_requires='>=3.10',
    include_package_data=True,
    install_requires=[
        'click>=7.0',
        'rich>=9.0'
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'tessera = tessera.cli.main:main'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)

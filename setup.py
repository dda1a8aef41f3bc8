#!/usr/bin/env python3
from setuptools import setup, find_packages

package_name = 'ds_log'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    install_requires=['setuptools', 'PyYAML'],
    extras_require={'test': ['pytest']},
    python_requires='>=3.8',
    zip_safe=False,
    maintainer='LibDS Team',
    maintainer_email='support@example.com',
    description='Rotating diagnostic log writer for the driver station.',
    license='MIT',
    tests_require=['pytest'],
    entry_points={
        'console_scripts': [
            'ds_log = ds_log.app.cli:main',
        ],
    },
)

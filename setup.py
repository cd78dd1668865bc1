from setuptools import find_packages, setup
import os
from glob import glob

package_name = 'slice_limit_markers'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test']),
    data_files=[
        ('share/ament_index/resource_index/packages',
            ['resource/' + package_name]),
        ('share/' + package_name, ['package.xml']),
        (os.path.join('share', package_name), glob('launch/*.launch.py')),
        (os.path.join('share', package_name, 'config'), glob('config/*.yaml')),
    ],
    install_requires=[
        'setuptools',
        'numpy',
        'scipy',
    ],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    maintainer='khalil',
    maintainer_email='kh4lil@outlook.com',
    description='Top and bottom slice limit markers for RViz',
    license='MIT',
    tests_require=['pytest'],
    entry_points={
        'console_scripts': [
            'slice_limit_marker_pub = slice_limit_markers.slice_limit_marker_pub_node:main',
        ],
    },
)

from setuptools import find_packages, setup

package_name = 'waypoint_trajectory'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test', 'test.*']),
    package_data={
        package_name: ['config/*.yaml'],
    },
    python_requires='>=3.11',
    install_requires=[
        'setuptools',
        'numpy>=1.20.0',
        'scipy>=1.7.0',
        'paho-mqtt>=2.0',
        'pyyaml',
    ],
    zip_safe=True,
    maintainer='hansoo',
    maintainer_email='hansoo@todo.todo',
    description='Minimum-derivative polynomial trajectory generation from waypoints',
    license='Apache-2.0',
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'trajectory_node = waypoint_trajectory.presentation.main:main',
        ],
    },
)

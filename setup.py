from setuptools import find_packages, setup

package_name = 'plotclock_kinematics'

setup(
    name=package_name,
    version='1.0.0',
    packages=find_packages(exclude=['test', 'tests']),
    install_requires=['setuptools', 'numpy'],
    python_requires='>=3.8',
    zip_safe=True,
    description='Forward and inverse kinematics for the two-servo plotclock drawing arm',
    extras_require={
        'test': [
            'pytest',
        ],
        'plot': [
            'matplotlib',
        ],
    },
    entry_points={
        'console_scripts': [
            'plotclock_workspace = plotclock.plotclock_cli:main',
        ],
    },
)

from setuptools import setup, find_packages

setup(
    name="spire",
    version="0.1.0",
    packages=find_packages(),
    install_requires=[
        "rich>=13.0.0",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'spire-eval=spire.rl.mcts.eval:main',
            'spire-viewer=spire.rl.mcts.viewer:main',
        ],
    },
)

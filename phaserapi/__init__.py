"""phaserapi: synthetic Phaser/PIXI API generator for editor tooling.

Reads the JSDoc of the Phaser sources and writes a loadable JavaScript
stub that mirrors the library's namespaces, constructors and prototypes,
for autocompletion and static analysis.
"""

__version__ = "0.1.0"

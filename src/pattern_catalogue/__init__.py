"""Pattern Catalogue - Root Package.

This package provides small, self-printing demonstrations of the classic
object-oriented design patterns, grouped by family.

Key Components:
    - domain: The pattern implementations (creational, structural, behavioral)
    - application: Demo drivers and the service that runs them
    - infrastructure: Structured logging and the demo registry
    - config: Default configuration, overrides and validation
    - cli: Command line interface for listing and running demos

Architecture:
    Each pattern is independent. Demo drivers are registered with the
    catalogue and executed through the application service, which the CLI
    exposes to the user.

Usage:
    The catalogue is typically used through the command-line interface:

    $ pattern-catalogue list --format table
    $ pattern-catalogue run observer memento
    $ pattern-catalogue run --family structural
"""

from ._package import PACKAGE_NAME, __version__

__author__ = "Pattern Catalogue Contributors"
__package_name__ = PACKAGE_NAME

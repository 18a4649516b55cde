"""
Application Layer Ports (Interfaces)

Contains Protocol definitions for dependency inversion.
Infrastructure Layer implements these protocols.
"""

from src.application.ports.messaging import MessagingClientProtocol

__all__ = ["MessagingClientProtocol"]

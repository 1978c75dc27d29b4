"""
Multisig wallet configurations and their descriptors.

Turning descriptors into a wallet configuration (and back) is the job of a wallet policy
engine, provided by the caller. This module takes care of the descriptor notations around
it: a wallet may be imported from its receive descriptor, its change descriptor or a single
multipath descriptor, and exported as a single multipath descriptor.
"""

from __future__ import annotations

import logging

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, Union

from bip389.descriptors.checksum import descsum_check
from bip389.descriptors.errors import (
    ChecksumMismatchError,
    DescriptorParsingError,
    MissingChecksumError,
)
from bip389.descriptors.parsing import DescriptorPaths, fold_to_multipath, parse_paths

logger = logging.getLogger(__name__)


class Network(Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"
    REGTEST = "regtest"
    SIGNET = "signet"

    def from_str(network_str: str) -> Network:
        # The descriptor engines call mainnet "bitcoin".
        if network_str == "bitcoin":
            return Network.MAINNET
        try:
            return Network(network_str)
        except ValueError:
            raise ValueError(f"Unknown network: '{network_str}'")


class AddressType(Enum):
    P2SH = "P2SH"
    P2SH_P2WSH = "P2SH-P2WSH"
    P2WSH = "P2WSH"
    P2TR = "P2TR"


class KeyOrigin:
    """A signer of a multisig wallet: its master key fingerprint, the derivation path to
    its extended key and the extended key itself."""

    def __init__(self, xfp: str, bip32_path: str, xpub: str):
        assert isinstance(xfp, str) and len(xfp) == 8
        assert isinstance(bip32_path, str) and isinstance(xpub, str)

        self.xfp: str = xfp
        self.bip32_path: str = bip32_path
        self.xpub: str = xpub

    def __repr__(self) -> str:
        return f"KeyOrigin(xfp={self.xfp}, bip32_path={self.bip32_path}, xpub={self.xpub})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, KeyOrigin):
            return NotImplemented
        return (self.xfp, self.bip32_path, self.xpub) == (
            other.xfp,
            other.bip32_path,
            other.xpub,
        )


class WalletConfig:
    """The configuration of a multisig wallet."""

    def __init__(
        self,
        required_signers: int,
        address_type: AddressType,
        key_origins: List[KeyOrigin],
        network: Network = Network.MAINNET,
    ):
        assert isinstance(required_signers, int)
        assert isinstance(address_type, AddressType)
        assert isinstance(key_origins, list)
        assert all(isinstance(k, KeyOrigin) for k in key_origins)
        assert isinstance(network, Network)

        self.required_signers: int = required_signers
        self.address_type: AddressType = address_type
        self.key_origins: List[KeyOrigin] = key_origins
        self.network: Network = network

    def __repr__(self) -> str:
        return (
            f"WalletConfig({self.required_signers}-of-{len(self.key_origins)}, "
            f"{self.address_type.value}, {self.network.value})"
        )


class WalletPolicyEngine(ABC):
    """An engine able to interpret descriptors as a multisig wallet policy."""

    @abstractmethod
    async def decode_descriptor_pair(
        self, internal: str, external: str, network: Optional[Network] = None
    ) -> WalletConfig:
        """Get the wallet configuration from its change and receive descriptors.

        Must raise a NetworkMismatchError if the extended keys don't belong to the
        requested network.
        """
        raise NotImplementedError

    @abstractmethod
    async def encode_wallet_config(self, config: WalletConfig) -> DescriptorPaths:
        """Get the receive and change descriptors of this wallet configuration."""
        raise NotImplementedError


class WalletDescriptors:
    """Import and export multisig wallets from and to their descriptors."""

    def __init__(self, engine: WalletPolicyEngine):
        assert isinstance(engine, WalletPolicyEngine)
        self.engine = engine

    async def decode_descriptors(
        self,
        internal: str,
        external: str,
        network: Optional[Union[Network, str]] = None,
    ) -> WalletConfig:
        """Get the wallet configuration from its change and receive descriptors."""
        if isinstance(network, str):
            network = Network.from_str(network)
        logger.debug("Decoding descriptors '%s' and '%s'", external, internal)
        return await self.engine.decode_descriptor_pair(internal, external, network)

    async def encode_descriptors(self, config: WalletConfig) -> DescriptorPaths:
        """Get the receive and change descriptors of this wallet configuration."""
        return await self.engine.encode_wallet_config(config)

    async def encode_descriptor_with_multipath(self, config: WalletConfig) -> str:
        """Get a single multipath descriptor for this wallet configuration."""
        paths = await self.encode_descriptors(config)
        logger.debug(
            "Folding descriptors '%s' and '%s'", paths.external, paths.internal
        )
        return fold_to_multipath(paths.external, paths.internal)

    async def get_wallet_from_descriptor(
        self, descriptor: str, network: Optional[Union[Network, str]] = None
    ) -> WalletConfig:
        """Get the wallet configuration from either its receive descriptor, its change
        descriptor or its multipath descriptor.
        """
        external, internal = parse_paths(descriptor)
        return await self.decode_descriptors(internal, external, network)

    async def get_checksum(self, descriptor: str) -> str:
        """Get the checksum of a valid wallet descriptor.

        The descriptor must be understood by the engine and carry a valid checksum.
        """
        try:
            await self.get_wallet_from_descriptor(descriptor)
        except ValueError as e:
            message = getattr(e, "message", str(e))
            raise DescriptorParsingError(f"Invalid descriptor: {message}") from e

        pieces = descriptor.split("#")
        if len(pieces) != 2:
            raise MissingChecksumError("Could not find valid checksum")
        if not descsum_check(descriptor):
            raise ChecksumMismatchError(
                f"Checksum '{pieces[1]}' is invalid for '{pieces[0]}'"
            )
        return pieces[1]

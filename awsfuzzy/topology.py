"""Tree views of Network Manager global networks and transit gateway routes."""

from __future__ import annotations

import ipaddress
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from awsfuzzy.tags import get_tag

ROOT_TRANSIT_GATEWAYS = "Transit Gateways"
ROOT_GLOBAL_NETWORKS = "Global Networks"

# Attachment resource types, in the order their groups appear under a gateway.
_ATTACHMENT_GROUPS: tuple[tuple[str, str], ...] = (
    ("vpc", "vpcs"),
    ("vpn", "vpns"),
    ("direct-connect-gateway", "dxs"),
    ("connect", "connections"),
    ("peering", "peerings"),
    ("tgw-peering", "tgwpeerings"),
)


@dataclass
class TreeData:
    """A node of a tree chart."""

    name: str = ""
    children: list[TreeData] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the node as chart data; empty names and child lists are left out."""
        data: dict[str, Any] = {}
        if self.name:
            data["name"] = self.name
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass
class TransitGatewayRegistration:
    """A transit gateway registered to a global network, with its attachments.

    Attachments use the EC2 API shape: ResourceType, ResourceOwnerId,
    TransitGatewayAttachmentId, ResourceId and Tags.
    """

    name: str
    region: str
    attachments: list[Mapping[str, Any]] = field(default_factory=list)


def _account(owner_id: str, account_names: Mapping[str, str]) -> str:
    return account_names.get(owner_id, owner_id)


def _attachment_label(
    attachment: Mapping[str, Any], account_names: Mapping[str, str], *, with_cidr: bool
) -> str:
    tags = attachment.get("Tags")
    parts = [
        get_tag(tags, "Name", attachment.get("TransitGatewayAttachmentId") or ""),
        _account(attachment.get("ResourceOwnerId") or "", account_names),
        attachment.get("ResourceId") or "",
    ]
    if with_cidr:
        parts.append(get_tag(tags, "cidr", ""))
    return "\n".join(parts)


def map_registrations(
    registrations: Iterable[TransitGatewayRegistration],
    account_names: Mapping[str, str],
) -> TreeData:
    """Group transit gateways by region and their attachments by resource type."""
    regions: dict[str, list[TreeData]] = {}
    for registration in registrations:
        groups: dict[str, list[TreeData]] = {kind: [] for kind, _ in _ATTACHMENT_GROUPS}
        for attachment in registration.attachments:
            kind = attachment.get("ResourceType")
            if kind not in groups:
                continue
            label = _attachment_label(attachment, account_names, with_cidr=True)
            groups[kind].append(TreeData(name=label))
        children = [
            TreeData(name=group_name, children=groups[kind])
            for kind, group_name in _ATTACHMENT_GROUPS
            if groups[kind]
        ]
        regions.setdefault(registration.region, []).append(
            TreeData(name=registration.name, children=children)
        )
    return TreeData(
        name=ROOT_TRANSIT_GATEWAYS,
        children=[TreeData(name=region, children=nodes) for region, nodes in regions.items()],
    )


def network_name(arn: str, tags: Iterable[Mapping[str, Any]] | None = None) -> str:
    """Return the Name tag of a global network, or the id from its ARN."""
    resource = arn.split(":", 5)[5] if arn.count(":") >= 5 else ""
    parts = resource.split("/")
    fallback = parts[1] if len(parts) > 1 else resource
    return get_tag(tags, "Name", fallback)


def build_global_tree(networks: Iterable[tuple[str, TreeData]]) -> list[TreeData]:
    """Build the chart roots from (network name, registrations tree) pairs.

    A single network is its own root; several are gathered under one node.
    """
    nodes = [TreeData(name=name, children=[tree]) for name, tree in networks]
    if not nodes:
        raise ValueError("could not find any global network")
    if len(nodes) == 1:
        return nodes
    return [TreeData(name=ROOT_GLOBAL_NETWORKS, children=nodes)]


def group_routes(
    table_name: str,
    routes: Iterable[tuple[str, Mapping[str, Any]]],
    account_names: Mapping[str, str],
) -> TreeData:
    """Group a route table's destinations under the resource each one leads to.

    ``routes`` holds (destination CIDR, attachment) pairs. Destinations under
    each resource are sorted by network address.
    """
    grouped: dict[str, tuple[str, list[ipaddress.IPv4Network | ipaddress.IPv6Network]]] = {}
    for cidr, attachment in routes:
        try:
            network = ipaddress.ip_network(cidr, strict=False)
        except ValueError as exc:
            raise ValueError(f"invalid destination CIDR {cidr!r}: {exc}") from exc
        resource_id = attachment.get("ResourceId") or ""
        if resource_id not in grouped:
            label = _attachment_label(attachment, account_names, with_cidr=False)
            grouped[resource_id] = (label, [])
        grouped[resource_id][1].append(network)

    children = []
    for label, networks in grouped.values():
        ordered: Sequence[ipaddress.IPv4Network | ipaddress.IPv6Network] = sorted(
            networks, key=lambda net: net.network_address.packed
        )
        children.append(
            TreeData(name=label, children=[TreeData(name=str(net)) for net in ordered])
        )
    return TreeData(name=table_name, children=children)
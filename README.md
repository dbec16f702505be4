# awsfuzzy

Building blocks for tools that work across many AWS accounts. The package
makes audit-friendly session names, builds EKS authentication tokens and
ExecCredential documents, decides which credential strategy a profile
uses, lists the resource types known to AWS Config, and shapes Transit
Gateway and Network Manager data into trees ready for a chart. It uses
only the standard library.

## Tags

`awsfuzzy.tags` works on AWS tag lists of `{"Key": ..., "Value": ...}`
mappings.

```python
from awsfuzzy.tags import get_tag, set_tag

tags = [{"Key": "Name", "Value": "web"}]
get_tag(tags, "Name", "unnamed")   # "web"
get_tag(tags, "env", "none")       # "none"
set_tag(tags, "env", "prod")       # a new list with the env tag appended
```

`set_tag` returns a new list. If the key is already present, the tags are
returned unchanged.

## Session names

`awsfuzzy.session_name` produces KSUIDs: 27 base62 characters that encode a
timestamp and 16 random bytes, so that they sort by time.

```python
from awsfuzzy.session_name import ksuid_from_parts, new_ksuid, session_name

ksuid_from_parts(1_400_000_000, bytes(16))  # "000000000000000000000000000"
new_ksuid()
session_name()  # "gntd-" followed by a KSUID, 32 characters in all
```

`ksuid_from_parts` raises `ValueError` if the payload is not 16 bytes long
or the timestamp falls outside the KSUID range.

## EKS tokens

```python
from awsfuzzy.ekstoken import (
    encode_token,
    parse_presigned_url_expiration,
    format_exec_credential,
)

expires = parse_presigned_url_expiration(presigned_url)
print(format_exec_credential(encode_token(presigned_url), expires))
```

A token is `k8s-aws-v1.` followed by the presigned URL in base64url
without padding. It expires fifteen minutes after the URL's `X-Amz-Date`.
A missing or malformed date raises `TokenError`. `exec_credential` returns
the `client.authentication.k8s.io/v1beta1` ExecCredential document as a
dict. `format_exec_credential` returns the same document as JSON indented
by four spaces, with the expiry in UTC (`YYYY-MM-DDTHH:MM:SSZ`).

## Credential assumers

`awsfuzzy.assumers` keeps an ordered registry of `Assumer` strategies. The
first one whose `profile_matches_type(raw, parsed)` returns True decides a
profile's type. `raw` is the collection of key names in the profile and
`parsed` is any object with an `sso_account_id` attribute.

- `CredentialProcessAssumer` (`"AWS_CREDENTIAL_PROCESS"`) matches profiles
  that have a `credential_process` key.
- `AwsIamAssumer` (`"AWS_IAM"`) matches anything without an SSO account id,
  so it comes last.

```python
from awsfuzzy.assumers import assumer_from_type, register_assumer, registered_assumers

registered_assumers()          # (CredentialProcessAssumer(), AwsIamAssumer())
assumer_from_type("AWS_IAM")   # AwsIamAssumer(), or None for an unknown type
register_assumer(my_assumer, 0)
```

`register_assumer` inserts at the given position. A negative or
out-of-range position appends the assumer instead.

## AWS Config resource types

`awsfuzzy.schema.AWS_SERVICES` maps lower-case keys such as `"ec2"` to
`AwsService(name, types)`, as in `AWS::<name>::<type>`.

```python
from awsfuzzy.schema import lookup_service, service_keys

ec2 = lookup_service("ec2")
ec2.name                 # "EC2"
ec2.has_type("Instance") # True
service_keys()[:3]       # alphabetical keys
```

`lookup_service` raises `KeyError` for an unknown key.

## Topology trees

`awsfuzzy.topology` builds `TreeData` nodes. `TreeData.to_dict()` returns
chart data in which empty names and empty child lists are left out.

- `map_registrations(registrations, account_names)` takes
  `TransitGatewayRegistration(name, region, attachments)` objects, where
  attachments use the EC2 API shape. It groups the gateways by region and
  their attachments by type, under `vpcs`, `vpns`, `dxs`, `connections`,
  `peerings` and `tgwpeerings`. Each attachment is labelled with its Name
  tag (or attachment id), its account name (or owner id), its resource id
  and its `cidr` tag.
- `network_name(arn, tags)` gives a global network's Name tag, or the id
  taken from its ARN.
- `build_global_tree(networks)` turns `(name, tree)` pairs into the chart
  roots. A single network stands alone. Several are gathered under
  "Global Networks". No networks at all raises `ValueError`.
- `group_routes(table_name, routes, account_names)` groups
  `(cidr, attachment)` pairs under the resource they lead to and sorts
  each group by network address. An invalid CIDR raises `ValueError`.

## What this package does not do

The package has no command-line program. It does not read the AWS config
or credentials files, log in through SSO, call AWS APIs, keep a settings
file or a token cache, or render HTML charts. It supplies the pieces such
a tool is built from. Fetching data from AWS and drawing the output are
left to the caller.
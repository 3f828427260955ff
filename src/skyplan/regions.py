"""
Static region table: region identifier -> boot image.

Images are Ubuntu 20.04 LTS 20211021 hvm:ebs-ssd (amd64),
see https://cloud-images.ubuntu.com/locator/ec2/
"""

from types import MappingProxyType

from .errors import InvalidRegionError
from .schemas.region import Region

# Region without a bootable image, used with custom API endpoints
CUSTOM_ENDPOINT = "custom-endpoint"

REGION_DETAILS = MappingProxyType(
    {
        "af-south-1": Region(name="af-south-1", image_id="ami-0ff86122fd4ad7208"),
        "ap-east-1": Region(name="ap-east-1", image_id="ami-0a9c1cc3697104990"),
        "ap-northeast-1": Region(name="ap-northeast-1", image_id="ami-036d0684fc96830ca"),
        "ap-northeast-2": Region(name="ap-northeast-2", image_id="ami-0f8b8babb98cc66d0"),
        "ap-northeast-3": Region(name="ap-northeast-3", image_id="ami-0c3904e7363bbc4bc"),
        "ap-south-1": Region(name="ap-south-1", image_id="ami-0567e0d2b4b2169ae"),
        "ap-southeast-1": Region(name="ap-southeast-1", image_id="ami-0fed77069cd5a6d6c"),
        "ap-southeast-2": Region(name="ap-southeast-2", image_id="ami-0bf8b986de7e3c7ce"),
        "ca-central-1": Region(name="ca-central-1", image_id="ami-0bb84e7329f4fa1f7"),
        "cn-north-1": Region(name="cn-north-1", image_id="ami-0741e7b8b4fb0001c"),
        "cn-northwest-1": Region(name="cn-northwest-1", image_id="ami-0883e8062ff31f727"),
        "eu-central-1": Region(name="eu-central-1", image_id="ami-0a49b025fffbbdac6"),
        "eu-north-1": Region(name="eu-north-1", image_id="ami-0bd9c26722573e69b"),
        "eu-south-1": Region(name="eu-south-1", image_id="ami-0f8ce9c417115413d"),
        "eu-west-1": Region(name="eu-west-1", image_id="ami-08edbb0e85d6a0a07"),
        "eu-west-2": Region(name="eu-west-2", image_id="ami-0fdf70ed5c34c5f52"),
        "eu-west-3": Region(name="eu-west-3", image_id="ami-06d79c60d7454e2af"),
        "me-south-1": Region(name="me-south-1", image_id="ami-0b4946d7420c44be4"),
        "sa-east-1": Region(name="sa-east-1", image_id="ami-0e66f5495b4efdd0f"),
        "us-east-1": Region(name="us-east-1", image_id="ami-083654bd07b5da81d"),
        "us-east-2": Region(name="us-east-2", image_id="ami-0629230e074c580f2"),
        "us-gov-east-1": Region(name="us-gov-east-1", image_id="ami-0fe6338c47e61cd5d"),
        "us-gov-west-1": Region(name="us-gov-west-1", image_id="ami-087ee83c8de303181"),
        "us-west-1": Region(name="us-west-1", image_id="ami-053ac55bdcfe96e85"),
        "us-west-2": Region(name="us-west-2", image_id="ami-036d46416a34a611c"),
        CUSTOM_ENDPOINT: Region(name=CUSTOM_ENDPOINT, image_id=""),
    }
)


def list_regions() -> list[str]:
    return list(REGION_DETAILS)


def validate_region(candidate: str) -> str:
    """Returns the candidate unchanged if it is a known region (exact match)."""
    if candidate not in REGION_DETAILS:
        raise InvalidRegionError(candidate)
    return candidate


def get_region(candidate: str) -> Region:
    return REGION_DETAILS[validate_region(candidate)]


def image_for_region(candidate: str) -> str | None:
    """
    Boot image id for a region.
    None for regions that are valid but carry no image (custom endpoints).
    """
    return get_region(candidate).image_id or None

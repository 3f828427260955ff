# Port the docker engine listens on (TLS)
DOCKER_PORT = 2376

# Swarm master port used when the cluster URL carries no usable port
DEFAULT_SWARM_PORT = 3376

# Every instance is tagged with this, firewall rules target it
BASELINE_TAG = "docker-machine"

# Name of the firewall rule holding the opened ports
FIREWALL_RULE_NAME = "docker-machines"

# Only these protocols are audited
PROTOCOLS = ("tcp", "udp")
DEFAULT_PROTOCOL = "tcp"

# Network / subnetwork names
# e.g. default, my-vpc, subnet-1
NETWORK_NAME_PATTERN = r"^[a-z]([-a-z0-9]*[a-z0-9])?$"
NETWORK_NAME_MAX_LENGTH = 63

# Compute API base, global network URLs are resolved against it
COMPUTE_API_URL = "https://www.googleapis.com/compute/v1/projects/"

# Access config type granting an ephemeral external IP
EXTERNAL_NAT_TYPE = "ONE_TO_ONE_NAT"
EXTERNAL_NAT_NAME = "External NAT"

import warnings

# compute.py imports google.cloud.compute_v1 for its message types; the SDK's
# FutureWarnings are noise for a planner that never calls the API.
warnings.filterwarnings("ignore", category=FutureWarning, module="google.api_core")
warnings.filterwarnings("ignore", category=FutureWarning, module="google.cloud")

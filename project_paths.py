from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent
DATA_DIR = REPO_ROOT / "data"
ORIGINALS_DIR = DATA_DIR / "originals"
ARTIFACTS_DIR = DATA_DIR / "artifacts"
ARTIFACT_CSV_DIR = ARTIFACTS_DIR / "csv"
ARTIFACT_BLOCKS_DIR = ARTIFACTS_DIR / "blocks"

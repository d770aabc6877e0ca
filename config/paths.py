from pathlib import Path

# === Base project path ===
PROJECT_ROOT = Path(__file__).resolve().parents[1]

# === Common directories ===
DATA_DIR = PROJECT_ROOT / "data"
CONFIG_DIR = PROJECT_ROOT / "config"
LOG_DIR = PROJECT_ROOT  # or change to PROJECT_ROOT / "logs" in future

# === Config and sample batch files ===
CONSTANTS_PATH = CONFIG_DIR / "constants.json"
SAMPLE_BATCH_PATH = DATA_DIR / "lab_data.json"

# === Default log file path ===
LOG_PATH = LOG_DIR / "lab_schedule.log"

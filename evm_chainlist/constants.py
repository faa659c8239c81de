REQUIRED_FIELDS = ("name", "chainId")

MODULE_PREFIX = "EVM_CHAINLIST"

ENV_DISABLE_AUTOLOAD = MODULE_PREFIX + "_DISABLE_AUTOLOAD"
ENV_DATA_DIR = MODULE_PREFIX + "_DATA_DIR"

# bool is an int subclass but never a valid index value
INDEX_TYPES = (str, int, float)

CONFIG_FILE_SUFFIXES = (".json", ".json5", ".yml", ".yaml", ".toml")

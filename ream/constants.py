"""Consensus-layer constants for the mainnet preset."""

BASE_REWARD_FACTOR = 64
BLS_WITHDRAWAL_PREFIX = b"\x00"
CAPELLA_FORK_VERSION = bytes.fromhex("03000000")
CHURN_LIMIT_QUOTIENT = 65536
DEPOSIT_CONTRACT_TREE_DEPTH = 32
DOMAIN_BEACON_ATTESTER = bytes.fromhex("01000000")
DOMAIN_BEACON_PROPOSER = bytes.fromhex("00000000")
DOMAIN_BLS_TO_EXECUTION_CHANGE = bytes.fromhex("0A000000")
DOMAIN_DEPOSIT = bytes.fromhex("03000000")
DOMAIN_RANDAO = bytes.fromhex("02000000")
DOMAIN_SYNC_COMMITTEE = bytes.fromhex("07000000")
DOMAIN_VOLUNTARY_EXIT = bytes.fromhex("04000000")
EFFECTIVE_BALANCE_INCREMENT = 1_000_000_000
EJECTION_BALANCE = 16_000_000_000
EPOCHS_PER_ETH1_VOTING_PERIOD = 64
EPOCHS_PER_HISTORICAL_VECTOR = 65536
EPOCHS_PER_SLASHINGS_VECTOR = 8192
EPOCHS_PER_SYNC_COMMITTEE_PERIOD = 256
ETH1_ADDRESS_WITHDRAWAL_PREFIX = b"\x01"
FAR_FUTURE_EPOCH = 18446744073709551615
GENESIS_SLOT = 0
GENESIS_EPOCH = 0
GENESIS_FORK_VERSION = bytes.fromhex("00000000")
HYSTERESIS_DOWNWARD_MULTIPLIER = 1
HYSTERESIS_UPWARD_MULTIPLIER = 5
HYSTERESIS_QUOTIENT = 4
INACTIVITY_PENALTY_QUOTIENT_ALTAIR = 50331648
INTERVALS_PER_SLOT = 3
INACTIVITY_SCORE_BIAS = 4
INACTIVITY_SCORE_RECOVERY_RATE = 16
JUSTIFICATION_BITS_LENGTH = 4
MAX_BLOBS_PER_BLOCK = 6
MAX_COMMITTEES_PER_SLOT = 64
MAX_DEPOSITS = 16
MAX_SEED_LOOKAHEAD = 4
MAX_EFFECTIVE_BALANCE = 32_000_000_000
MAX_PER_EPOCH_ACTIVATION_CHURN_LIMIT = 8
MAX_RANDOM_BYTE = 255
MAX_VALIDATORS_PER_WITHDRAWALS_SWEEP = 16384
MAX_WITHDRAWALS_PER_PAYLOAD = 16
MIN_ATTESTATION_INCLUSION_DELAY = 1
MIN_EPOCHS_TO_INACTIVITY_PENALTY = 4
MIN_GENESIS_ACTIVE_VALIDATOR_COUNT = 16384
MIN_GENESIS_TIME = 1606824000
MIN_PER_EPOCH_CHURN_LIMIT = 4
MIN_SEED_LOOKAHEAD = 1
MIN_SLASHING_PENALTY_QUOTIENT = 32  # Bellatrix value
MIN_VALIDATOR_WITHDRAWABILITY_DELAY = 256
NUM_FLAG_INDICES = 3
PROPORTIONAL_SLASHING_MULTIPLIER_BELLATRIX = 3
PROPOSER_REWARD_QUOTIENT = 8
PROPOSER_SCORE_BOOST = 40
PROPOSER_WEIGHT = 8
REORG_MAX_EPOCHS_SINCE_FINALIZATION = 2
REORG_HEAD_WEIGHT_THRESHOLD = 20
REORG_PARENT_WEIGHT_THRESHOLD = 160
SECONDS_PER_SLOT = 12
SHARD_COMMITTEE_PERIOD = 256
SHUFFLE_ROUND_COUNT = 90
SLOTS_PER_EPOCH = 32
SLOTS_PER_HISTORICAL_ROOT = 8192
SYNC_COMMITTEE_SIZE = 512
SYNC_REWARD_WEIGHT = 2
TARGET_COMMITTEE_SIZE = 128
TIMELY_HEAD_FLAG_INDEX = 2
TIMELY_SOURCE_FLAG_INDEX = 0
TIMELY_TARGET_FLAG_INDEX = 1
TIMELY_SOURCE_WEIGHT = 14
TIMELY_TARGET_WEIGHT = 26
TIMELY_HEAD_WEIGHT = 14
WEIGHT_DENOMINATOR = 64
WHISTLEBLOWER_REWARD_QUOTIENT = 512

PARTICIPATION_FLAG_WEIGHTS = (
    TIMELY_SOURCE_WEIGHT,
    TIMELY_TARGET_WEIGHT,
    TIMELY_HEAD_WEIGHT,
)
DATE_FORMAT = "%Y/%m/%d %H:%M"
DATE_FORMAT_HINT = "yyyy/MM/dd HH:mm"
# strptime accepts unpadded fields, the pattern does not.
DATE_PATTERN = r"\d{4}/\d{2}/\d{2} \d{2}:\d{2}"

EVENT_DETAILS_DELIMITER = "|"
EVENT_FIELDS = ("name", "start", "end", "location", "description")
EVENT_FIELD_COUNT = len(EVENT_FIELDS)

FIND_PREFIX = "find"

# Events live only as long as the process.
DATABASE_NAME = ":memory:"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"

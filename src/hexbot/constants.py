### Servo Layout ###
# Leg servo channels as (shoulder, elbow) pairs, front to back.
# Even channels are shoulders, odd channels are elbows.
LEFT_LEGS = ((0, 1), (2, 3), (4, 5))
RIGHT_LEGS = ((10, 11), (8, 9), (6, 7))

# ===============================
# Servo Validation Constants
# ===============================
# PCA9685 is a 12-bit PWM, positions are expressed as OFF counts.
PWM_RESOLUTION = 4096
SERVO_PWM_MIN = 100
SERVO_PWM_MAX = 520
DEFAULT_SERVO_MIN = 150
DEFAULT_SERVO_MAX = 450
DEFAULT_SERVO_NEUTRAL = 300

# ===============================
# PCA9685 Board
# ===============================
PCA9685_ADDRESS = 0x40
PCA9685_REFERENCE_CLOCK_SPEED = 25000000
PCA9685_FREQUENCY = 50

# ===============================
# PID Controller
# ===============================
PID_KP = 0.2
PID_KI = 0.0
PID_KD = 0.02
# Anti-windup clamp on the accumulated error
PID_INTEGRAL_LIMIT = 200.0
# Maximum position change per tick, in PWM counts
PID_OUTPUT_LIMIT = 8.0

# ===============================
# Settling and Startup
# ===============================
# Settling tick period (seconds)
TICK_INTERVAL = 0.01
# Delay between activating two servos during the startup ramp (seconds)
RAMP_SETTLE_INTERVAL = 0.05
# Delay between the shoulder and elbow groups of the startup ramp (seconds)
RAMP_GROUP_PAUSE = 0.5
# Bounded wait for in-flight handlers on shutdown (seconds)
SHUTDOWN_DRAIN_TIMEOUT = 0.5
# Interval between loop statistics log lines (seconds)
LOOP_STATS_INTERVAL = 1.0

# ===============================
# Gestures
# ===============================
LEAN_BUTTON = 4
STAND_UP_BUTTON = 3
STAND_DOWN_BUTTON = 0
STAND_RESET_BUTTON = 1
# Height change per second of holding a stand button (normalized units)
STAND_HEIGHT_RATE = 0.5

# ===============================
# Analog Input Filtering
# ===============================
# Raw Linux joystick axes range from -32767 to 32767
AXIS_NORMALIZATION_CONSTANT = 32767
# Radial deadzone for analog stick drift (0.0-1.0)
DEADZONE = 0.08

# ===============================
# Remote Controller
# ===============================
DEVICE_PATH = '/dev/input'
DEFAULT_DEVICE = 'js0'
# Delay between read loop iterations (in seconds)
READ_LOOP_SLEEP = 0.005
# Delay between failed device detection cycles (in seconds)
DEVICE_SEARCH_INTERVAL = 2.5
# Rate at which a held joystick state is republished (in Hz)
PUBLISH_RATE_HZ = 50
# Size of the joystick event buffer to read from /dev/input (in bytes)
JSDEV_READ_SIZE = 8
# Joystick ioctl request codes (linux/joystick.h)
JSIOCGAXES = 0x80016A11
JSIOCGBUTTONS = 0x80016A12
JSIOCGNAME = 0x80006A13
JSIOCGAXMAP = 0x80406A32
JSIOCGBTNMAP = 0x80406A34

# ===============================
# Configuration
# ===============================
CONFIG_FILE_NAME = 'hexbot.json'
CONFIG_ENV_VAR = 'HEXBOT_CONFIG'

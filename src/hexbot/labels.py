"""
Log and user-facing strings for the hexbot runtime.
"""

# Main
MAIN_STARTING = 'Hexbot runtime starting...'
MAIN_RUNNING = 'Robot running!'
MAIN_TERMINATED = 'Hexbot runtime terminated'
MAIN_CONFIG_ERROR = 'Invalid configuration: %s'
MAIN_HARDWARE_ERROR = 'Could not initialize hardware: %s'

# Configuration
CONFIG_LOADING = 'Loading configuration from %s'
CONFIG_NOT_FOUND = 'Configuration file %s not found, using defaults'
CONFIG_INVALID_JSON = 'Configuration file is not valid JSON: %s'
CONFIG_MODULES = 'Detected configuration for the modules: %s'

# Servo configuration validation
ERR_SERVO_CONFIG_MIN_MAX_ORDER = 'Servo {index}: minimum ({minimum}) must be lower than maximum ({maximum})'
ERR_SERVO_CONFIG_OUT_OF_RANGE = (
    'Servo {index}: {field} ({value}) is outside the valid PWM range [{SERVO_PWM_MIN}, {SERVO_PWM_MAX}]'
)
ERR_SERVO_CONFIG_NEUTRAL_OUT_OF_RANGE = 'Servo {index}: neutral ({neutral}) is outside [{minimum}, {maximum}]'
ERR_SERVO_CONFIG_UNKNOWN_INDEX = 'Servo {index} is not part of the leg layout'

# Motion controller
MOTION_STARTING = 'Starting motion controller with %d servos'
MOTION_INPUT_REJECTED = 'Input sample rejected, keeping previous state: %s'
MOTION_TICK_FAILED = 'Settling tick aborted: %s'
MOTION_SETTLE_FILTER = 'Settle filter now %s'
MOTION_LOOP_STATS = 'Settle loop avg tick interval: %.2f ms (%.2f Hz)'
MOTION_SHUTDOWN_STARTED = 'Shutting down motion controller'
MOTION_SHUTDOWN_IN_PROGRESS = 'Shutdown already in progress, ignoring request'
MOTION_DRAIN_TIMEOUT = 'Timed out waiting for %d handlers to finish'
MOTION_PWM_STOPPED = 'PWM board stopped'
MOTION_PWM_STOP_FAILED = 'Could not stop PWM board cleanly: %s'
MOTION_HANDLER_FAILED = 'Unexpected error handling %s message, continuing'
MOTION_TERMINATED = 'Motion controller terminated'

# Startup ramp
RAMP_STARTING = 'Startup ramp: activating %d shoulders then %d elbows'
RAMP_ACTIVATED = 'Startup ramp: servo %d active (%d/%d)'
RAMP_CANCELLED = 'Startup ramp cancelled with %d/%d servos active'
RAMP_COMPLETE = 'Startup ramp complete, settling all servos'

# Abort controller
ABORT_SIGNAL_RECEIVED = 'Received %s, shutting down'
ABORT_SIGNAL_IGNORED = 'Received %s while shutting down, ignoring'

# Remote controller
REMOTE_LOOKING_FOR_DEVICES = 'Looking for {} in /dev/input'
REMOTE_ATTEMPTING_OPEN = 'Attempting to open {}'
REMOTE_OPEN_SUCCESS = 'Opened {}'
REMOTE_OPEN_WARNING = 'Could not open {}: {}'
REMOTE_CONNECTED = 'Connected to device: %s'
REMOTE_AXES_FOUND = '{} axes found: {}'
REMOTE_BUTTONS_FOUND = '{} buttons found: {}'
REMOTE_INIT_MAPPING_ERROR = 'Could not read joystick mappings: {}'
REMOTE_READ_ERROR = 'Error reading joystick: {}'
REMOTE_CLOSE_WARNING = 'Error closing joystick: {}'
REMOTE_DISCONNECTED = 'Remote controller disconnected, releasing all inputs'
REMOTE_TERMINATED = 'Remote controller terminated'

# Power relay
RELAY_ATTEMPTING_GPIO = 'Attempting GPIO initialization for servo power relay'
RELAY_GPIO_SUCCESS = 'GPIO initialized for servo power relay'
RELAY_GPIO_WARNING = 'GPIO initialization failed, retrying: %s'
RELAY_GPIO_ERROR = 'GPIO initialization failed permanently'
RELAY_POWER_ON = 'Servo power enabled'
RELAY_POWER_OFF = 'Servo power disabled'

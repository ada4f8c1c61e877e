# Linux joystick API (linux/joystick.h): event types and the driver codes
# reported by JSIOCGAXMAP / JSIOCGBTNMAP for common gamepads.

# Event type bitmasks, JS_EVENT_INIT may be OR'ed with the other two
JS_EVENT_BUTTON = 0x01
JS_EVENT_AXIS = 0x02
JS_EVENT_INIT = 0x80

AXIS_X = 0x00
AXIS_Y = 0x01
AXIS_Z = 0x02
AXIS_RX = 0x03
AXIS_RY = 0x04
AXIS_RZ = 0x05
AXIS_GAS = 0x09
AXIS_BRAKE = 0x0A
AXIS_HAT0X = 0x10
AXIS_HAT0Y = 0x11

BTN_A = 0x130
BTN_B = 0x131
BTN_X = 0x133
BTN_Y = 0x134
BTN_TL = 0x136
BTN_TR = 0x137
BTN_TL2 = 0x138
BTN_TR2 = 0x139
BTN_SELECT = 0x13A
BTN_START = 0x13B
BTN_MODE = 0x13C
BTN_THUMBL = 0x13D
BTN_THUMBR = 0x13E

# Readable names, only used when logging what a device reports
DRIVER_CODE_NAMES = {
    AXIS_X: "x",
    AXIS_Y: "y",
    AXIS_Z: "z",
    AXIS_RX: "rx",
    AXIS_RY: "ry",
    AXIS_RZ: "rz",
    AXIS_GAS: "gas",
    AXIS_BRAKE: "brake",
    AXIS_HAT0X: "hat0x",
    AXIS_HAT0Y: "hat0y",
    BTN_A: "a",
    BTN_B: "b",
    BTN_X: "x",
    BTN_Y: "y",
    BTN_TL: "tl",
    BTN_TR: "tr",
    BTN_TL2: "tl2",
    BTN_TR2: "tr2",
    BTN_SELECT: "select",
    BTN_START: "start",
    BTN_MODE: "mode",
    BTN_THUMBL: "thumbl",
    BTN_THUMBR: "thumbr",
}

"""
Process-wide default logger

``default`` is created once at import with LoggerConfig.default() and
writes to sys.stdout. The module-level functions are bound methods of
that one instance, so ``dispatchlog.set_level("debug")`` configures the
same logger ``dispatchlog.debug(...)`` prints through.
"""

from dispatchlog.core.logger import Logger

default = Logger()

set_prefix = default.set_prefix
set_time_format = default.set_time_format
set_level = default.set_level
set_output = default.set_output
add_output = default.add_output
handle = default.handle
install = default.install
install_std = default.install_std
hijack = default.hijack
scan = default.scan
child = default.child

print = default.print
println = default.println
log = default.log
logf = default.logf
error = default.error
errorf = default.errorf
warn = default.warn
warnf = default.warnf
info = default.info
infof = default.infof
debug = default.debug
debugf = default.debugf

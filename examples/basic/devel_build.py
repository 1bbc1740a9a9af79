"""Build a development edition of a script: logging and alarms switched on."""

from jsdev import transform

source = """\
function pay(amount) {
    /*log 'pay', amount*/
    /*alarm(amount < 0) 'negative amount'*/
    return charge(amount);
}
"""

print(transform(source, ["log:console.log", "alarm:alert"], comments=["Devel Edition"]))

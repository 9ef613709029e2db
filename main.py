import sys

from services import crash_reporter, debug_log


def main():
    # Install crash logging as early as possible so silent exits are captured.
    crash_reporter.install()
    debug_log.log("starting", tag="App")

    from PyQt5.QtWidgets import QApplication
    from controllers.app_controller import AppController

    app = QApplication(sys.argv)
    controller = AppController()
    controller.launch()
    rc = app.exec_()
    debug_log.log(f"exit rc={rc}", tag="App")
    return rc


if __name__ == "__main__":
    sys.exit(main())

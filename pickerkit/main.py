# main.py
from ttkbootstrap import Window

from pickerkit.config import THEME
from pickerkit.ui import DemoForm


def main():
    root = Window(themename=THEME)
    DemoForm(root)
    root.mainloop()


if __name__ == "__main__":
    main()

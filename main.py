# main.py
# 설치 없이 실행: python main.py -m n 0000001100000030 3
import sys

from cr3.Cli import main

if __name__ == "__main__":
    sys.exit(main())

from tubeinfo.cli import tubeinfo

tubeinfo()

from cpuapi.server import main

main()

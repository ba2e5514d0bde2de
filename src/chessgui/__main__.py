from chessgui.app import main

main()

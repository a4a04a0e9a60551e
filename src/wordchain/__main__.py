from wordchain import main

main()
